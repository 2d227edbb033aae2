"""Feature modules for neo-filenames."""
