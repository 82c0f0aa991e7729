"""Command-line front-end: step table in, threshold report JSON out."""
