"""Kernel – content model and error hierarchy shared by every component."""
