"""WhyCookIn: restaurants, discounts and community forum API."""

__version__ = "1.0.0"
