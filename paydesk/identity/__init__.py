"""Identity: users, password hashing, token codec and access gate."""
