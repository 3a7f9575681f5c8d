"""Gameplay rule services: combat math, secret discovery and objectives."""
