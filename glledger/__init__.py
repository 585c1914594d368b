"""General-ledger accounting module: GL account commands and journal entry reads."""
