"""HTTP delivery of ProPresenter export archives."""
