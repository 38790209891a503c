"""Static watch-list snapshots used when live sources are unavailable."""
