"""limitless-sync - incremental Limitless lifelog sync to daily markdown files."""
