"""Use cases grouped by feature (auth, payroll, directory)."""
