"""APB Catalog - resolve Automation Playbook Bundle images into specs."""

__version__ = "0.1.0"
