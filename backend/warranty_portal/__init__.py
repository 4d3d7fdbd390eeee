"""Warranty portal — role selection, mocked OTP login and warranty screens over fixture data."""
