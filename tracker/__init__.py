"""Command-line runners for sat_track."""
