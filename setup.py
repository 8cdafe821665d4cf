import setuptools

if __name__ == '__main__':
    setuptools.setup(
        name='screencam',
        version='1.0.0',
        author='The screencam developers',
        description='Record the screen into a v4l2loopback virtual camera',
        license='MIT',
        python_requires='>=3.8',
        packages=['screencam'],
        py_modules=['share_screen'],
        extras_require={
            'test': ['pytest'],
        },
        entry_points={
            'console_scripts': [
                'screencam = screencam.main:entry',
                'share-screen = share_screen:entry',
            ],
        }
    )
