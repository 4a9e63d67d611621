"""nsync - turns desire-app requests into desired LRP recipes."""
