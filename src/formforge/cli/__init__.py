"""formforge command line."""
