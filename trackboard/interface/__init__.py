"""Terminal UI for trackboard: viewports, screens, router and app."""
