"""messagely: a small messaging web service."""
