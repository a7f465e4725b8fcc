"""Operating-systems exercises: scheduling, memory management, threads, a list client and chat state."""

__version__ = "0.1.0"