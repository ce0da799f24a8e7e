"""Interface Segregation Principle: no client should depend on methods it does not use."""
