"""AgendaPro test suite."""
