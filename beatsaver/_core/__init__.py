"""Internal building blocks of the beatsaver client."""
