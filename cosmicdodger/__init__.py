"""Cosmic Dodger: entities, components and UI for a meteor-dodging arcade game."""

__version__ = "0.1.0"