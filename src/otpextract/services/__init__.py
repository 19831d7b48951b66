"""Helpers for applications consuming extracted codes."""

from .otp_reader import OtpReader

__all__ = ["OtpReader"]
