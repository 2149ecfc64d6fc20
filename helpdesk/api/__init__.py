"""HTTP surface for the helpdesk tool."""
