"""Tools the model can call during a changelog run."""
