"""Q&A forum core: votes, reputation, acceptance and notifications."""
