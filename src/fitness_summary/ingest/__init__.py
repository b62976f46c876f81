"""Readers for workout CSV and health-metrics JSON exports."""
