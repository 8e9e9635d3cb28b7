"""chili command-line interface."""
