"""Configuration, domain values and services of the Issuetrak console."""
