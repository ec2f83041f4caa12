"""Ansible dynamic inventory for DigitalOcean droplets."""

__version__ = "0.1.0"
