"""APA 7 rule tables and localised messages."""
