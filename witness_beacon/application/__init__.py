"""Application layer: selection and signature collection use cases."""
