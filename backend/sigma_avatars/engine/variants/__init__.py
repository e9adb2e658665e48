"""One module per avatar variant; importing a module registers its generator."""
