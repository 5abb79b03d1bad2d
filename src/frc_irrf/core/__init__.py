"""Core domain: models, rules, calculators, aggregators and services."""
