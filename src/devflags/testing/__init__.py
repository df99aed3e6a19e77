"""Testing – fakes for the collaborators around a session."""
