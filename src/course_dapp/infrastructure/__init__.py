"""Infrastructure layer: storage, wire schemas, rollup transport and actions."""
