"""Service layer: ISBN operations returning ServiceResult."""
