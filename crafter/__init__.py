"""Project Crafter: Upwork Project Catalog listing wizard service."""
