from fastapi import APIRouter

from pullgate.api.infra.config_templates import write_config_templates
from pullgate.api.middleware import fails_with

router = APIRouter()


@router.get("/generate-configs")
@fails_with("Failed to generate configurations.")
async def generate_configs() -> dict[str, str]:
    """
    Write a Dockerfile and a Terraform file to the current directory of the
    server. Existing files are overwritten.
    """

    write_config_templates()

    return {"message": "Configurations generated successfully."}
