"""Code shared by the Home Rental apps: the domain error taxonomy and its DRF handler."""
