"""Infrastructure: persistence and external adapters."""
