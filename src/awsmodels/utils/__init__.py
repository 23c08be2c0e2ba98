"""String and date conversion helpers."""
