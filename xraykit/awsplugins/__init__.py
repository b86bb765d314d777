"""Plugins that record EC2, ECS and Elastic Beanstalk host metadata."""