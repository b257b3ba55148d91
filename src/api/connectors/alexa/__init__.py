"""Connector Alexa."""
