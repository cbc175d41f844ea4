"""depwitness command-line interface."""
