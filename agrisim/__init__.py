"""AgriSim: day-stepped agro-economic field simulation."""

__version__ = "0.1.0"
