"""Record types and their JSON codecs."""
