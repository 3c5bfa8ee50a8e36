"""Code shared by the web service and the seed tool."""
