"""Domain layer - registry semantics independent of configuration and I/O."""
