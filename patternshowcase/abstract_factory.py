"""Abstract Factory pattern: cloud providers that create matching resources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Bucket(ABC):
    """A storage bucket."""

    @abstractmethod
    def upload(self, file: str) -> None:
        """Upload a file to the bucket."""


class ComputeInstance(ABC):
    """A compute instance."""

    @abstractmethod
    def start(self) -> str:
        """Start the instance and return the status line it reported."""


class CloudProvider(ABC):
    """A factory for a provider's family of resources."""

    @abstractmethod
    def create_bucket(self, name: str) -> Bucket:
        """Create a bucket with the given name."""

    @abstractmethod
    def create_compute_instance(self, instance_id: str) -> ComputeInstance:
        """Create a compute instance with the given id."""


@dataclass(frozen=True)
class AWSBucket(Bucket):
    name: str

    def upload(self, file: str) -> None:
        print(f"Uploading {file} to AWS S3 bucket {self.name}")


@dataclass(frozen=True)
class AWSComputeInstance(ComputeInstance):
    instance_id: str

    def start(self) -> str:
        status = f"Starting AWS EC2 instance {self.instance_id}"
        print(status)
        return status


class AWSProvider(CloudProvider):
    """Creates AWS resources."""

    def create_bucket(self, name: str) -> Bucket:
        return AWSBucket(name)

    def create_compute_instance(self, instance_id: str) -> ComputeInstance:
        return AWSComputeInstance(instance_id)


@dataclass(frozen=True)
class GCPBucket(Bucket):
    name: str

    def upload(self, file: str) -> None:
        print(f"Uploading {file} to GCP Storage bucket {self.name}")


@dataclass(frozen=True)
class GCPComputeInstance(ComputeInstance):
    instance_id: str

    def start(self) -> str:
        status = f"Starting GCP Compute Engine instance {self.instance_id}"
        print(status)
        return status


class GCPProvider(CloudProvider):
    """Creates GCP resources."""

    def create_bucket(self, name: str) -> Bucket:
        return GCPBucket(name)

    def create_compute_instance(self, instance_id: str) -> ComputeInstance:
        return GCPComputeInstance(instance_id)


def provision_infrastructure(factory: CloudProvider) -> None:
    """Create a log bucket and a web instance using the given provider."""
    bucket = factory.create_bucket("logs")
    bucket.upload("app.log")

    instance = factory.create_compute_instance("web-1")
    instance.start()


def run() -> None:
    """Demonstrate the Abstract Factory pattern."""
    print("Provisioning on AWS:")
    provision_infrastructure(AWSProvider())

    print("\nProvisioning on GCP:")
    provision_infrastructure(GCPProvider())