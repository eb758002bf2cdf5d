"""Organization canvases -- saved org-chart layouts stored as opaque JSON."""
