"""Service layer — turns domain values and errors into ServiceResult."""
