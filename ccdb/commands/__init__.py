"""Commands mounted on the ccdb click group."""
