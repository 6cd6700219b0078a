"""Simulators for classic CPU scheduling algorithms: FCFS, SJF, SRTF, priority and round robin."""

__version__ = "0.1.0"