"""Desktop front end."""
