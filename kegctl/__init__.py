"""kegctl - taps, dependents and service paths for a package-manager prefix."""
