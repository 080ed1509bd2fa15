"""Mock factories for the repository interfaces."""
