"""Interactive Spring Initializr client.

Fetches the service's capability catalog, walks the user through the
project settings it allows, then downloads and unpacks the generated
project.
"""

__version__ = "0.1.0"
