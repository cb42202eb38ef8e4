"""Infrastructure adapters: logging and the Spotify embed endpoint."""
