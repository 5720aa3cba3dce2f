"""Presentation contract: input dispatch and derived view data."""
