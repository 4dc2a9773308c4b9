"""Administrative backend for members, plans, users and their audit trail."""
