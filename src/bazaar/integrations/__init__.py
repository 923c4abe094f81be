"""Clients for services bazaar talks to besides the document store."""
