"""Host integrations for the editor engine."""
