"""Data layer for master data, employee side records, backlogs, expiry reports and dashboards."""

__version__ = "0.1.0"