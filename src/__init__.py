"""
src - Indian Real-Estate Cost Estimator

Pure calculators for the costs around buying or renting a home in India.

Modules:
    - core: Exceptions, logging, settings, loan maths and currency formatting
    - domain.models: Pydantic models for rate tables and calculation results
    - domain.calculator: Stamp duty, deposit, loan and rent-vs-buy calculators
    - services: Loading and caching of the embedded rate tables
"""

__version__ = "1.4.0"
