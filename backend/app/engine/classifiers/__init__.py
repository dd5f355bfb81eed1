"""Shape classifiers. Each module registers one test via @classifier."""
