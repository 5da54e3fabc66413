"""HTTP service exposing recitation verification."""
