"""Summary of FASTA files found in a directory tree."""
