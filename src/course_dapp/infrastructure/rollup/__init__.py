"""Rollup host integration: transport, reporting, action registry and dispatch loop."""
