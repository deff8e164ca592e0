import pydantic


class CustomGroupRule(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    name: str
    prefixes: tuple[str, ...]

    def match(self, package_name: str) -> bool:
        return any(package_name.startswith(prefix) for prefix in self.prefixes)
