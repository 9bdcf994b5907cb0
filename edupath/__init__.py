"""EduPath records backend: accounts, university catalog and applications."""
