"""Help-desk ticket queue with users, technicians, distribution and reports."""

__version__ = "0.1.0"