"""Motor, mecanum drive, servo, JSON command and WebSocket server components for a small robot."""

__version__ = "0.1.0"