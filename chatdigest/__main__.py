"""
chatdigest — daily chat transcripts and summaries.

Usage:
  python -m chatdigest collect
  python -m chatdigest summarize 2024-03-14
  python -m chatdigest list
"""
from chatdigest.cli.app import app

if __name__ == "__main__":
    app()
