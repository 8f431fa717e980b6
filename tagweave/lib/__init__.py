"""Engine internals: options, substitution, resolution."""
