# smunch/__init__.py
# SMUNCH payments backend: PayNow instructions, receipts and customer emails.
