"""LLM chains, one per wizard stage."""
