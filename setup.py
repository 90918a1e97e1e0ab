from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="hand-gesture-classifier",
    version="1.0.0",
    author="Farshad Nozad Heravi",
    author_email="f.n.heravi@gmail.com",
    description="Rule-based hand gesture classification from MediaPipe hand landmarks",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/farshad-heravi/hand_gesture_detection",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Image Recognition",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "dev": [
            "pytest>=7.4.3",
            "pytest-cov>=4.1.0",
            "black>=23.11.0",
            "flake8>=6.1.0",
            "mypy>=1.7.1",
        ],
    },
    entry_points={
        "console_scripts": [
            "hgc-classify=hand_gesture_classifier.scripts.classify_landmarks:main",
            "hgc-image=hand_gesture_classifier.scripts.classify_image:main",
        ],
    },
    include_package_data=True,
    package_data={
        "hand_gesture_classifier": [
            "config/*.yaml",
            "config/*.yml",
        ],
    },
)
