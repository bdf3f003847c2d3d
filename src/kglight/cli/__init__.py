"""kglight command line interface."""
