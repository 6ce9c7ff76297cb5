"""
Delivery Cost Calculator

Prices a package by weight and distance under one of four delivery tiers.

Modules:
    - policies/: One pricing policy per tier
    - session.py: Holds the selected policy and validates inputs
    - inputs.py: Numeric input parsing shared by the shell and batch pricing
    - calculate_costs.py: DataFrame in, DataFrame out batch pricing
    - scripts/: Interactive calculator and batch CLI
"""
