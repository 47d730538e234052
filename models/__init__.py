"""MongoDB connection and collection accessors."""
