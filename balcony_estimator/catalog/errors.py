class CatalogError(Exception):
    """The material catalog could not answer a request."""


class MaterialNotFound(CatalogError):
    def __init__(self, material_id: str):
        self.material_id = material_id
        super().__init__("Material not found")
