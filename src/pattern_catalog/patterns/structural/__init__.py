"""Structural patterns: adapter, composite, decorator, facade, flyweight, proxy."""
