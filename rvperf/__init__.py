"""Building blocks of a RISC-V core performance model and a Dhrystone workload."""

__version__ = "0.1.0"