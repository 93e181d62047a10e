"""Application layer: analysis passes, checker facade and reporters."""
