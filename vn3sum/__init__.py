"""vn3sum — CLI do skracania licencji VN3."""
