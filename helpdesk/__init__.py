"""Prospectus helpdesk: section lookup and structured replies over program PDFs."""
