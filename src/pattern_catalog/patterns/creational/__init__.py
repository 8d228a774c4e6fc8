"""Creational patterns: abstract factory, builder, factory method, prototype, singleton."""
