from pathlib import Path
from textwrap import dedent

DOCKERFILE_NAME = "Dockerfile"
TERRAFORM_NAME = "main.tf"

DOCKERFILE = dedent(
    """\
    FROM node:16
    WORKDIR /app
    COPY package*.json ./
    RUN npm install
    COPY . ./
    EXPOSE 3000
    CMD ["npm", "start"]
    """
)

TERRAFORM = dedent(
    """\
    provider "aws" {
        region = "us-east-1"
    }

    resource "aws_instance" "web" {
        ami           = "ami-0c55b159cbfafe1f0"
        instance_type = "t2.micro"
        tags = {
            Name = "DevOps-Test"
        }
    }
    """
)


def write_config_templates(directory: Path = Path()) -> list[Path]:
    """
    Write the Dockerfile and Terraform templates into `directory`, replacing
    any files with the same name. The contents are always the same.
    """

    written = []

    for filename, content in (
        (DOCKERFILE_NAME, DOCKERFILE),
        (TERRAFORM_NAME, TERRAFORM),
    ):
        path = directory / filename
        path.write_text(content)

        written.append(path)

    return written
